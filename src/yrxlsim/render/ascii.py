"""
Fixed-width text grid rendering.

The column-letter header and the row-number gutter are unboxed and centered;
only the data block is framed with ``|`` separators and ``+---+`` borders:

       A   B
     +--+---+
    1 |x |=A1|
     +--+---+
"""

from typing import List, Optional

from yrxlsim.render.views import SheetView

MIN_CELL_WIDTH = 2


def pad_center(text: str, width: int) -> str:
    """Center text in width; an odd leftover space goes on the right."""
    if len(text) >= width:
        return text
    total = width - len(text)
    left = total // 2
    return " " * left + text + " " * (total - left)


def column_widths(view: SheetView) -> List[int]:
    """Width per column: the max of the minimum, the letters and the longest text."""
    widths = []
    for c, letters in enumerate(view.column_letters):
        width = max(MIN_CELL_WIDTH, len(letters))
        for row in view.texts:
            if c < len(row):
                width = max(width, len(row[c]))
        widths.append(width)
    return widths


def render_ascii(view: SheetView) -> str:
    """Render a view as a fixed-width text grid."""
    widths = column_widths(view)
    gutter = max(1, len(str(view.max_row)))

    header = " " * (gutter + 2) + "".join(
        pad_center(letters, width) + " " for letters, width in zip(view.column_letters, widths)
    )
    border = " " * (gutter + 1) + "+" + "".join("-" * width + "+" for width in widths)

    lines = [header.rstrip(), border]
    for r in range(view.max_row):
        texts = view.texts[r] if r < len(view.texts) else []
        cells = [
            (texts[c] if c < len(texts) else "").ljust(width)
            for c, width in enumerate(widths)
        ]
        lines.append(pad_center(str(r + 1), gutter) + " |" + "|".join(cells) + "|")
    lines.append(border)
    return "\n".join(lines)


def render_ascii_views(formulas: Optional[SheetView], values: Optional[SheetView], view: str) -> str:
    """Render the requested view(s) of one sheet; ``both`` stacks formulas over values."""
    if view == "formulas":
        return render_ascii(formulas)
    if view == "values":
        return render_ascii(values)
    return (
        "FORMULAS VIEW\n\n" + render_ascii(formulas)
        + "\n\nVALUES VIEW\n\n" + render_ascii(values)
    )
