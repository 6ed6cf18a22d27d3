from __future__ import annotations

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "ul": 4,
    "reverse": 7,
    "strike": 9,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}


class Color:
    @staticmethod
    def codes(style: str | list[str]) -> list[int]:
        names = style.split() if isinstance(style, str) else list(style)

        try:
            codes = [SGR_CODES[name.lower()] for name in names]
        except KeyError as e:
            raise ValueError(f"Unknown style name: {e}") from e

        # a second color name sets the background
        foreground = False
        for i, code in enumerate(codes):
            if 30 <= code <= 37:
                if foreground:
                    codes[i] += 10
                foreground = True

        return codes

    @staticmethod
    def format(style: str | list[str], text: str) -> str:
        code_str = ";".join(str(c) for c in Color.codes(style))
        return f"\x1b[{code_str}m{text}\x1b[0m"
