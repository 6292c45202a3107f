from typing import Tuple


def total_seconds(hours: int = 0, minutes: int = 0, seconds: int = 0) -> int:
    return hours * 3600 + minutes * 60 + seconds


def split_hms(total: int) -> Tuple[int, int, int]:
    total = abs(total)
    hours = total // 3600
    minutes = (total // 60) % 60
    seconds = total % 60
    return hours, minutes, seconds


def format_countdown(total: int, show_leading_zero_groups: bool = False) -> str:
    sign = "-" if total < 0 else ""
    hours, minutes, seconds = split_hms(total)

    text = ""
    if hours or show_leading_zero_groups:
        text += f"{hours:02d}:"
    if hours or minutes or show_leading_zero_groups:
        text += f"{minutes:02d}:"
    text += f"{seconds:02d}"
    return sign + text
