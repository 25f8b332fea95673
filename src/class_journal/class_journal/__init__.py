"""Class Journal package.

Organized by feature modules (students, attendance, entries) with thin Flask
controllers on top of async service/repository layers, and a realtime hub
that fans change events out to Socket.IO clients.
"""
