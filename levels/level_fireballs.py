"""Bouncing fireballs guard the coins."""

PLAN = [
    "                            ",
    "      o       |        o    ",
    "   xxxxx             xxxxx  ",
    "                            ",
    "  @        =       o        ",
    "xxxxxx          xxxxxx      ",
    "     x   | o  |      x     o",
    "     xxxxxxxxxxxxxxxxx  xxxx",
    "                            ",
]
