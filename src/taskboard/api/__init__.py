"""
REST layer.

Components:
- models.py: resource records (User, Project, Task) and enums (TaskStatus, Priority)
- errors.py: server / network / setup error kinds + describe_error()
- credentials.py: bearer-token providers
- client.py: the shared httpx-based ApiClient with request/response interceptors
- resource.py: generic CRUD service bound to one collection path
- users.py, projects.py, tasks.py: one API class per resource
"""
