"""
Adapters — the boundary between the packaging helpers and the host.

Everything that spawns a process or touches the filesystem lives here.
"""
