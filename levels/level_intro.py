"""Three coins over a lava pit; no fireballs."""

PLAN = [
    "                          ",
    "                          ",
    "                      o   ",
    "                    xxxx  ",
    "          o               ",
    "  @      xxx              ",
    "xxxxx              o      ",
    "    x!!!!!!!!!!!!xxxxxx   ",
    "    xxxxxxxxxxxxxx        ",
    "                          ",
]
