"""Board, placement, fleet and attack rules."""
