"""Render hands as columns of box-drawn cards."""

from typing import Callable, Sequence

from core.hand import Hand

CARD_WIDTH = 6
BLANK = " " * CARD_WIDTH


def hand_lines(hand: Hand) -> list[str]:
    """
    Lines showing a hand vertically, one six-character line each.

    Each card shows its top edge and face; the last card also shows its
    bottom. The final line is the hand's status or value footer.
    """
    lines: list[str] = []
    for card in hand.cards:
        lines.append("╭────╮")
        lines.append(f"│{card.token}│")
    lines.append("│    │")
    lines.append("╰────╯")
    lines.append(hand.footer)
    return lines


def render_table(
    player_hands: Sequence[Hand],
    active_index: int,
    dealer_hand: Hand | None = None,
) -> str:
    """
    Render all hands side by side.

    The header marks the active player hand with PLAY and the dealer's
    column with DEAL. Pass a negative ``active_index`` to mark no hand.
    """
    columns = [hand_lines(hand) for hand in player_hands]
    headers = [
        " PLAY " if index == active_index else BLANK
        for index in range(len(player_hands))
    ]
    if dealer_hand is not None and dealer_hand.cards:
        columns.append(hand_lines(dealer_hand))
        headers.append(" DEAL ")

    height = max((len(column) for column in columns), default=0)
    rows = [" ".join(headers)]
    for row in range(height):
        rows.append(" ".join(
            column[row] if row < len(column) else BLANK for column in columns
        ))
    return "\n".join(row.rstrip() for row in rows) + "\n"


class ConsoleRenderer:
    """Render collaborator writing the table to an output function."""

    def __init__(self, output: Callable[[str], None] = print) -> None:
        self._output = output

    def __call__(
        self,
        player_hands: Sequence[Hand],
        active_index: int,
        dealer_hand: Hand | None,
    ) -> None:
        self._output(render_table(player_hands, active_index, dealer_hand))
