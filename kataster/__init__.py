"""An asteroids-style arcade shooter: game logic, menus and a pygame front end."""

__version__ = "0.0.1"