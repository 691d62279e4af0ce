"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from tictactoe.game.board import BOARD_SIZE, TicTacToeGameState, format_point
from tictactoe.game.types import Player, Point

# Layout constants
CELL_SIZE = 100
MARGIN = 30
BOARD_PX = MARGIN * 2 + CELL_SIZE * BOARD_SIZE
MARK_INSET = 22  # Gap between a cell edge and its X/O

# Colors
BG_COLOR = "#1E293B"
LINE_COLOR = "#CBD5E1"
X_COLOR = "#38BDF8"
O_COLOR = "#FB923C"
LAST_MOVE_COLOR = "rgba(255, 255, 255, 0.08)"
WIN_BANNER_COLOR = "#4ADE80"
LOSS_BANNER_COLOR = "#F87171"
DRAW_BANNER_COLOR = "#FFFFFF"


def _cell_origin(point: Point) -> tuple[int, int]:
    """Top-left SVG pixel of a 0-indexed cell."""
    return MARGIN + point.col * CELL_SIZE, MARGIN + point.row * CELL_SIZE


def _mark_svg(point: Point, player: Player) -> str:
    x, y = _cell_origin(point)
    lo_x, lo_y = x + MARK_INSET, y + MARK_INSET
    hi_x, hi_y = x + CELL_SIZE - MARK_INSET, y + CELL_SIZE - MARK_INSET
    if player is Player.FIRST:
        return (
            f'<line x1="{lo_x}" y1="{lo_y}" x2="{hi_x}" y2="{hi_y}" '
            f'stroke="{X_COLOR}" stroke-width="8" stroke-linecap="round"/>'
            f'<line x1="{hi_x}" y1="{lo_y}" x2="{lo_x}" y2="{hi_y}" '
            f'stroke="{X_COLOR}" stroke-width="8" stroke-linecap="round"/>'
        )
    cx, cy = x + CELL_SIZE // 2, y + CELL_SIZE // 2
    r = CELL_SIZE // 2 - MARK_INSET
    return (
        f'<circle cx="{cx}" cy="{cy}" r="{r}" fill="none" '
        f'stroke="{O_COLOR}" stroke-width="8"/>'
    )


def _banner_color(message: str) -> str:
    if "You win" in message:
        return WIN_BANNER_COLOR
    if "AI wins" in message:
        return LOSS_BANNER_COLOR
    return DRAW_BANNER_COLOR


def render_board_svg(
    game_state: TicTacToeGameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="tictactoe-board">'
    )
    parts.append(
        f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{BG_COLOR}" rx="8"/>'
    )

    # Last move highlight sits under the mark
    last_point: Optional[Point] = None
    if highlight_last and game_state.moves:
        last_point = game_state.moves[-1].point
        x, y = _cell_origin(last_point)
        parts.append(
            f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
            f'fill="{LAST_MOVE_COLOR}"/>'
        )

    # Inner grid lines only
    far = MARGIN + BOARD_SIZE * CELL_SIZE
    for i in range(1, BOARD_SIZE):
        offset = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{offset}" y1="{MARGIN}" x2="{offset}" y2="{far}" '
            f'stroke="{LINE_COLOR}" stroke-width="4" stroke-linecap="round"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{offset}" x2="{far}" y2="{offset}" '
            f'stroke="{LINE_COLOR}" stroke-width="4" stroke-linecap="round"/>'
        )

    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            pt = Point(r, c)
            player = game_state.board.get(pt)
            if player is not None:
                parts.append(_mark_svg(pt, player))

    # Clickable cell targets (invisible rects)
    if clickable and not game_state.is_over:
        for pt in game_state.board.open_cells():
            x, y = _cell_origin(pt)
            coord_str = format_point(pt)
            parts.append(
                f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></rect>'
            )

    if game_over_message:
        mid = BOARD_PX // 2
        parts.append(
            f'<rect x="0" y="{mid - 36}" width="{BOARD_PX}" height="72" '
            f'fill="rgba(0, 0, 0, 0.65)"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 12}" text-anchor="middle" '
            f'font-size="34" font-family="sans-serif" font-weight="bold" '
            f'fill="{_banner_color(game_over_message)}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then presses the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._tictactoeClickBound) return;
    window._tictactoeClickBound = true;

    document.addEventListener('click', function(e) {
        const cell = e.target.closest('.board-click');
        if (!cell) return;
        const coord = cell.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (container) {
            // Native setter so Gradio notices the change
            const proto = container.tagName === 'TEXTAREA'
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
            if (nativeSetter) {
                nativeSetter.call(container, coord);
            } else {
                container.value = coord;
            }
            container.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#coord-submit');
            if (btn) btn.click();
        }
    });
}
"""
