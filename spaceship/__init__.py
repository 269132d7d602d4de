"""
Spaceship catalog API: images, planets and astronauts.
"""
__version__ = "1.0.0"
