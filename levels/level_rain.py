"""Fire rain falls from the ceiling while lava waits below."""

PLAN = [
    "xxxxxxxxxxxxxxxxxxxxxxxxxx",
    "x      v     v      v    x",
    "x                        x",
    "x  o        o        o   x",
    "x                        x",
    "x @   xx    xx    xx     x",
    "xxxxxxxx!!!!xx!!!!xxxxxxxx",
    "       xxxxxx xxxx       ",
]
