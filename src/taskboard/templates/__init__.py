"""
Copy-and-adapt starting points for new resource types.

Components:
- entity_api.py: Entity model, EntityApi service, batch/upload helpers
- entity_board.py: headless CRUD board with client-side status filter
"""
