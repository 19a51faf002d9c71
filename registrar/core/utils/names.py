# (c) Copyright Datacraft, 2026
"""Attorney name matching.

Case files reference attorneys by display name, so every comparison
goes through the same normalisation: trimmed and case-folded.
"""


def normalize_name(name: str | None) -> str:
	return (name or "").strip().lower()


def names_match(a: str | None, b: str | None) -> bool:
	left = normalize_name(a)
	return bool(left) and left == normalize_name(b)
