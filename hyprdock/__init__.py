"""Hyprdock - a laptop docking daemon for Hyprland.

Listens to lid open/close events from acpid and keeps the internal and external
monitor layout consistent by running configurable commands for the display
backend, status bar, wallpaper, power and media tools.
The daemon runs as an asyncio service, reading the acpid Unix socket.
"""
