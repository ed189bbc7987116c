"""Application composition layer for the Tkinter pass display.

Modules in this package wire views, the view model, adapters and the tick
timer into a runnable desktop window without placing state logic in views.
"""
