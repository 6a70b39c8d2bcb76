"""Configuration for the starlings murmuration simulation."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Starlings"
}

CAMERA = {
    "fov": 75.0,
    "near_clip": 1.0,
    "far_clip": 3000.0,
    "initial_radius": 1040.0,   # ~ |(600, 600, 600)|
    "initial_theta": 45.0,
    "initial_phi": 35.0,
    "min_radius": 50.0,
    "max_radius": 2500.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 200.0,
    "mouse_sensitivity": 0.3
}

GRID = {
    "color": (0.75, 0.75, 0.78)
}

STARLINGS = {
    "resolution": 32,          # Grid side; agent count = resolution^2
    "birds": None,             # Explicit agent count, overrides resolution
    "separation": 20.0,
    "alignment": 30.0,
    "cohesion": 20.0,
    "freedom": 0.3,
    "bounds": 500.0,           # Half-width of the cubic domain
    "seed": None,              # Initial-state RNG seed
    "max_dt": 1.0,             # Clamp after stalls
}

COLORS = {
    "background_color": "#fff",
    "bird_color": "#ccc",
    "hud": (40, 40, 40),
}

FOG = {
    "start": 100.0,
    "end": 1000.0,
}
