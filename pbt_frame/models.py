from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    lines: tuple[str, ...]          # border, content lines..., border

    def __post_init__(self) -> None:
        if len(self.lines) < 3:
            raise ValueError("a frame needs a top border, at least one content line and a bottom border")

    @property
    def width(self) -> int:
        return len(self.lines[0])

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def border(self) -> str:
        return self.lines[0]

    @property
    def content(self) -> tuple[str, ...]:
        return self.lines[1:-1]

    def render(self) -> str:
        # 固定使用 "\n"，与平台无关
        return "\n".join(self.lines)
