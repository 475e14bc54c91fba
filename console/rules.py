"""House rules shown by the ``rules`` command."""

RULES_TEXT = """\
BLACKJACK HOUSE RULES

GOAL
  Get each of your hands closer to 21 than the dealer without going over.

CARD VALUES
  2-10        face value
  J, Q, K     10
  A           11, or 1 if 11 would take the hand over 21

START
  Play 1 to 7 hands against the dealer. Each hand starts with two cards.
  A hand of an Ace and a ten-valued card is a Blackjack.

PLAYER OPTIONS
  hit          take another card
  stand        take no more cards
  double down  take exactly one more card, then stop (two-card hands only)
  split        split two cards of equal value into two hands, each dealt
               a second card (at most 7 hands in play)
  surrender    give up the hand (two-card hands only, not after a split)

  A split Ace cannot be hit. An Ace and a ten after a split count as 21,
  not as a Blackjack.

DEALER
  The dealer draws until reaching 17 or more, then stands.

STATUSES
  [STND] stood        [DBLD] doubled down   [SURR] surrendered
  [BUST] over 21      [ 21 ] twenty-one     [ BJ ] blackjack
  -SPLT- just split
"""
