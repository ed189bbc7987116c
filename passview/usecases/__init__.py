"""Use-case layer between the view model and the storage ports.

Modules here coordinate domain keys, the key-value store and the image codec
without knowing anything about Tk, preserving MVVM + Hexagonal boundaries.
"""
