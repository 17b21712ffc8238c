"""logic — Show simulation package.

Top-level modules
-----------------
helpers    — range sampling and planar distance
particles  — burst particles
fireworks  — rising shells
engine     — per-tick orchestrator owning both populations
"""
