"""ViewModel package for UI state and command surfaces.

Call context:
    ``passview/app/main.py`` imports ``TicketVM`` to bind Tk view callbacks to
    state transitions.

Dependencies:
    Modules in this package depend on domain types and the persistence use
    case only. Tk and storage adapters remain outside.

Responsibilities:
    - Expose observable UI state and command intent callbacks.
    - Decide when a change is written through and when it is deferred.
"""
