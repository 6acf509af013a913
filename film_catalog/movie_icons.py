"""
Movie icon helper.
Picks a decorative emoji for a movie from keywords in its name.
"""

from typing import Optional

# Keyword (lowercase substring of the name) -> icon; first match wins
ICON_KEYWORDS = (
	('pirate', '🏴‍☠️'),
	('treasure', '💰'),
	('space', '🚀'),
	('star', '⭐'),
	('prison', '🔒'),
	('escape', '🏃'),
	('family', '👨‍👩‍👧'),
	('knight', '🦇'),
	('dark', '🌑'),
	('king', '👑'),
	('ring', '💍'),
	('dream', '💭'),
	('matrix', '💊'),
	('war', '⚔️'),
	('love', '❤️'),
	('life', '🌱'),
)

DEFAULT_ICON = '🎬'


def get_movie_icon(movie_name: Optional[str]) -> str:
	"""Return the icon for the first keyword found in the name, or the clapperboard."""
	if not movie_name:
		return DEFAULT_ICON

	lower_name = movie_name.lower()
	for keyword, icon in ICON_KEYWORDS:
		if keyword in lower_name:
			return icon
	return DEFAULT_ICON
