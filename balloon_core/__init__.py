"""
Balloon Pop core Python package.

Pure-logic building blocks for the balloon pop puzzle, kept free of any
console or web I/O so they can be tested on their own.
Modules:
- board.py: Balloon symbols, Coord, Snapshot
- rules.py: compactness, pop-ability and float steps over a snapshot
- deal.py: initial board fills (random, from a matrix)
- history.py: History (undo arena of snapshots)
- session.py: BalloonGame
- render.py, cli.py: text rendering and the console driver
"""
