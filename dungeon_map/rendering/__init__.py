"""
Dungeon Map - Rendering Module

Host-side backends for the render context capabilities. Import the backend
you need (pygame_rendering or pil_rendering) directly.
"""
