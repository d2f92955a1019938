"""Component tests for the board engine.

1. Location - coordinates and neighbour candidates (goban/location.py)
2. Stone - colours (goban/stone.py)
3. Group - groups and the flood-fill partition (goban/group.py)
4. Board - placement, liberties, capture and text form (goban/board.py)
5. Coordinates and rendering (goban/coords.py, goban/show_board.py)
"""
