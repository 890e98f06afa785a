"""Alpha-beta search, move generation and line evaluation."""
