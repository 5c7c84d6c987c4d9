"""Deterministic alien icons for alien-tagged words."""
import math

BODY_COLORS = ["#7FFFD4", "#FF69B4", "#8A2BE2", "#00CED1", "#ADFF2F", "#FFA07A", "#90EE90"]
ORB_COLORS = ["#FFD700", "#FF69B4", "#00FF7F", "#00FFFF", "#FF4500"]
EYES = [
    '<circle class="eye" cx="22" cy="28" r="4" fill="#000"/> <circle class="eye" cx="42" cy="28" r="4" fill="#000"/>',
    '<circle class="eye" cx="32" cy="28" r="6" fill="#000"/>',
    '<circle class="eye" cx="18" cy="28" r="4" fill="#000"/> <circle class="eye" cx="32" cy="22" r="4" fill="#000"/>'
    ' <circle class="eye" cx="46" cy="28" r="4" fill="#000"/>',
]
MOUTHS = [
    '<path d="M20 44 Q32 50 44 44" stroke="#000" stroke-width="2" fill="transparent"/>',
    '<rect x="24" y="42" width="16" height="4" rx="2" fill="#000"/>',
    '<path d="M22 42 Q32 52 42 42" stroke="#000" stroke-width="3" fill="none" stroke-linecap="round"/>',
]


def string_hash(seed: str) -> int:
    """Signed 32-bit ``h * 31 + c`` hash over the UTF-16 code units of a string."""
    units = seed.encode("utf-16-le")
    value = 0
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        value = (code + (value << 5) - value) & 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def seeded_choice(seed: str, size: int) -> int:
    """Pick an index in [0, size) from a string seed."""
    result = abs(math.sin(string_hash(seed))) * 10000
    return int(result % size)


def generate_alien_svg(word: str, compact: bool = False) -> str:
    """Render the alien icon for a word as SVG markup."""
    seed = word.lower()
    body_color = BODY_COLORS[seeded_choice(seed, len(BODY_COLORS))]
    eyes = EYES[seeded_choice(seed + "e", len(EYES))]
    mouth = MOUTHS[seeded_choice(seed + "m", len(MOUTHS))]
    orb_left = ORB_COLORS[seeded_choice(seed + "l", len(ORB_COLORS))]
    orb_right = ORB_COLORS[seeded_choice(seed + "r", len(ORB_COLORS))]
    offset = seeded_choice(seed + "a", 6) - 3

    size = 40 if compact else 70
    scale = 0.7 if compact else 1

    return f"""
    <svg width="{size}" height="{size}" viewBox="0 0 64 64" style="transform: scale({scale});">
      <line x1="{24 + offset}" y1="10" x2="{26 + offset}" y2="20" stroke="#000" stroke-width="2"/>
      <circle cx="{24 + offset}" cy="10" r="3" fill="{orb_left}" stroke="#000" stroke-width="1"/>
      <line x1="{40 - offset}" y1="10" x2="{38 - offset}" y2="20" stroke="#000" stroke-width="2"/>
      <circle cx="{40 - offset}" cy="10" r="3" fill="{orb_right}" stroke="#000" stroke-width="1"/>
      <ellipse cx="32" cy="36" rx="26" ry="24" fill="{body_color}" stroke="#000" stroke-width="2"/>
      {eyes}
      {mouth}
      <circle cx="24" cy="60" r="3" fill="{body_color}" stroke="#000" stroke-width="1"/>
      <circle cx="40" cy="60" r="3" fill="{body_color}" stroke="#000" stroke-width="1"/>
    </svg>
    """
