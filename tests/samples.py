# unit RGB -> (hue, saturation, lightness)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.5, 0.25, 0.75): (270.0, 0.5, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# unit RGB -> (hue, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.75): (270.0, 2 / 3, 0.75),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# (hue, saturation, lightness) -> (hue, saturation, value), chromatic only
samples_hsl_hsv = {
    (0.0, 1.0, 0.5): (0.0, 1.0, 1.0),
    (120.0, 1.0, 0.5): (120.0, 1.0, 1.0),
    (270.0, 0.5, 0.5): (270.0, 2 / 3, 0.75),
    (210.0, 0.5, 0.4): (210.0, 2 / 3, 0.6),
    (30.0, 1.0, 0.25): (30.0, 1.0, 0.5),
}

# hex text -> 8-bit RGBA
samples_hex_rgba = {
    "000000": (0, 0, 0, 255),
    "FFFFFF": (255, 255, 255, 255),
    "1a2b3c": (0x1A, 0x2B, 0x3C, 255),
    "1A2B3C80": (0x1A, 0x2B, 0x3C, 0x80),
    "ff000000": (255, 0, 0, 0),
    "00Ff00": (0, 255, 0, 255),
}

valid_hex_edit_sequence = ["1", "1a", "1a2", "1a2b", "1a2b3", "1a2b3c"]
