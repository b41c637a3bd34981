"""
Console front end.

Components:
- bootstrap.py: composition root (settings -> client -> APIs -> board)
- commands.py: slash-command registry and handlers
- console.py: async REPL
- main.py: `taskboard` entrypoint
"""
