"""Services Layer — orchestrates DB sessions around the pure rules in core/.

Invariants:
    - Services raise QKartError subclasses; routes never translate them by hand
    - Services own the commit; repositories only flush
"""
