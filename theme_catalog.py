"""Static theme catalog.

Order matters: the first entry is the default and the UI lists themes in
declaration order. Colour values are "R G B" strings applied verbatim.
"""
from typing import Optional

from models import Theme, ThemeColors


def _theme(name: str, label: str, *, bg: str, main: str, sub: str, text: str, error: str) -> Theme:
	return Theme(
		name=name,
		label=label,
		colors=ThemeColors(bg=bg, main=main, sub=sub, text=text, error=error),
	)


THEMES: tuple[Theme, ...] = (
	_theme("zen_modern", "Zen Modern", bg="25 25 25", main="216 180 254", sub="113 113 122", text="228 228 231", error="239 68 68"),
	_theme("carbon", "Carbon", bg="49 49 49", main="246 109 0", sub="97 97 97", text="245 229 200", error="235 69 95"),
	_theme("serika_dark", "Serika Dark", bg="50 52 55", main="226 183 20", sub="100 102 105", text="209 208 197", error="202 71 84"),
	_theme("miami", "Miami", bg="24 24 24", main="228 96 155", sub="71 184 255", text="240 240 240", error="255 87 87"),
	_theme("dracula", "Dracula", bg="40 42 54", main="189 147 249", sub="98 114 164", text="248 248 242", error="255 85 85"),
	_theme("nord", "Nord", bg="46 52 64", main="136 192 208", sub="76 86 106", text="216 222 233", error="191 97 106"),
	_theme("gruvbox_dark", "Gruvbox Dark", bg="40 40 40", main="215 153 33", sub="168 153 132", text="235 219 178", error="204 36 29"),
	_theme("one_dark", "One Dark", bg="40 44 52", main="97 175 239", sub="92 99 112", text="171 178 191", error="224 108 117"),
	_theme("tokyo_night", "Tokyo Night", bg="26 27 38", main="122 162 247", sub="86 95 137", text="169 177 214", error="247 118 142"),
	_theme("botanical", "Botanical", bg="123 156 152", main="255 255 255", sub="73 94 91", text="234 242 241", error="255 107 107"),
	_theme("retro", "Retro", bg="218 211 193", main="153 194 77", sub="133 123 99", text="75 70 56", error="212 55 55"),
	_theme("matrix", "Matrix", bg="0 0 0", main="21 255 0", sub="0 100 0", text="13 189 2", error="255 0 0"),
)

DEFAULT_THEME: Theme = THEMES[0]

_BY_NAME = {theme.name: theme for theme in THEMES}

if len(_BY_NAME) != len(THEMES):
	raise RuntimeError("Theme names must be unique")


def list_themes() -> list[Theme]:
	"""Return all themes in display order."""
	return list(THEMES)


def get_theme(name: str) -> Optional[Theme]:
	"""Return the theme called `name`, or None if there is no such theme."""
	return _BY_NAME.get(name)
