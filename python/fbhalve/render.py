from __future__ import annotations

from .glyphs import HALVE_BLOCKS, quadrant_index


class Quadrant2x2:
    chars: tuple[str, ...] = HALVE_BLOCKS

    def __init__(self, invert: bool = False) -> None:
        self.inv = invert

    def pixel(self, data: list[list[bool]], y: int, x: int) -> bool:
        if y >= len(data) or x >= len(data[y]):
            return False
        return data[y][x] ^ self.inv

    def render(self, data: list[list[bool]]) -> str:
        if not data:
            return ""
        return "\n".join(
            "".join(
                self.chars[
                    quadrant_index(
                        self.pixel(data, y, x),
                        self.pixel(data, y + 1, x),
                        self.pixel(data, y, x + 1),
                        self.pixel(data, y + 1, x + 1),
                    )
                ]
                for x in range(0, len(data[y]), 2)
            )
            for y in range(0, len(data), 2)
        )


if __name__ == "__main__":
    print(Quadrant2x2().render([[True, True], [True, False], [False, True]]))
