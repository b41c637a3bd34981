"""
View layer.

Components:
- ports.py: Protocols the views depend on
- derived.py: pure filter/count helpers
- state.py: view modes and board state
- board.py: TaskBoard orchestration (load, actions, derived values)
"""
