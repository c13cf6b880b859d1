"""Named X11 colours and XPM colour specifications."""

from __future__ import annotations

import re

NONE_COLOR = -1
_NAME_BUFFER = 63
_LONG_MAX = 2**63 - 1
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")

_BASE = """\
snow fffafa
ghost white f8f8ff
ghostwhite f8f8ff
white smoke f5f5f5
whitesmoke f5f5f5
gainsboro dcdcdc
floral white fffaf0
floralwhite fffaf0
old lace fdf5e6
oldlace fdf5e6
linen faf0e6
antique white faebd7
antiquewhite faebd7
papaya whip ffefd5
papayawhip ffefd5
blanched almond ffebcd
blanchedalmond ffebcd
bisque ffe4c4
peach puff ffdab9
peachpuff ffdab9
navajo white ffdead
navajowhite ffdead
moccasin ffe4b5
cornsilk fff8dc
ivory fffff0
lemon chiffon fffacd
lemonchiffon fffacd
seashell fff5ee
honeydew f0fff0
mint cream f5fffa
mintcream f5fffa
azure f0ffff
alice blue f0f8ff
aliceblue f0f8ff
lavender e6e6fa
lavender blush fff0f5
lavenderblush fff0f5
misty rose ffe4e1
mistyrose ffe4e1
white ffffff
black 000000
dark slate 2f4f4f
darkslategray 2f4f4f
dark slate 2f4f4f
darkslategrey 2f4f4f
dim gray 696969
dimgray 696969
dim grey 696969
dimgrey 696969
slate gray 708090
slategray 708090
slate grey 708090
slategrey 708090
light slate 778899
lightslategray 778899
light slate 778899
lightslategrey 778899
gray bebebe
grey bebebe
light grey d3d3d3
lightgrey d3d3d3
light gray d3d3d3
lightgray d3d3d3
midnight blue 191970
midnightblue 191970
navy 000080
navy blue 000080
navyblue 000080
cornflower blue 6495ed
cornflowerblue 6495ed
dark slate 483d8b
darkslateblue 483d8b
slate blue 6a5acd
slateblue 6a5acd
medium slate 7b68ee
mediumslateblue 7b68ee
light slate 8470ff
lightslateblue 8470ff
medium blue 0000cd
mediumblue 0000cd
royal blue 4169e1
royalblue 4169e1
blue 0000ff
dodger blue 1e90ff
dodgerblue 1e90ff
deep sky 00bfff
deepskyblue 00bfff
sky blue 87ceeb
skyblue 87ceeb
light sky 87cefa
lightskyblue 87cefa
steel blue 4682b4
steelblue 4682b4
light steel b0c4de
lightsteelblue b0c4de
light blue add8e6
lightblue add8e6
powder blue b0e0e6
powderblue b0e0e6
pale turquoise afeeee
paleturquoise afeeee
dark turquoise 00ced1
darkturquoise 00ced1
medium turquoise 48d1cc
mediumturquoise 48d1cc
turquoise 40e0d0
cyan 00ffff
light cyan e0ffff
lightcyan e0ffff
cadet blue 5f9ea0
cadetblue 5f9ea0
medium aquamarine 66cdaa
mediumaquamarine 66cdaa
aquamarine 7fffd4
dark green 006400
darkgreen 006400
dark olive 556b2f
darkolivegreen 556b2f
dark sea 8fbc8f
darkseagreen 8fbc8f
sea green 2e8b57
seagreen 2e8b57
medium sea 3cb371
mediumseagreen 3cb371
light sea 20b2aa
lightseagreen 20b2aa
pale green 98fb98
palegreen 98fb98
spring green 00ff7f
springgreen 00ff7f
lawn green 7cfc00
lawngreen 7cfc00
green 00ff00
chartreuse 7fff00
medium spring 00fa9a
mediumspringgreen 00fa9a
green yellow adff2f
greenyellow adff2f
lime green 32cd32
limegreen 32cd32
yellow green 9acd32
yellowgreen 9acd32
forest green 228b22
forestgreen 228b22
olive drab 6b8e23
olivedrab 6b8e23
dark khaki bdb76b
darkkhaki bdb76b
khaki f0e68c
pale goldenrod eee8aa
palegoldenrod eee8aa
light goldenrod fafad2
lightgoldenrodyellow fafad2
light yellow ffffe0
lightyellow ffffe0
yellow ffff00
gold ffd700
light goldenrod eedd82
lightgoldenrod eedd82
goldenrod daa520
dark goldenrod b8860b
darkgoldenrod b8860b
rosy brown bc8f8f
rosybrown bc8f8f
indian red cd5c5c
indianred cd5c5c
saddle brown 8b4513
saddlebrown 8b4513
sienna a0522d
peru cd853f
burlywood deb887
beige f5f5dc
wheat f5deb3
sandy brown f4a460
sandybrown f4a460
tan d2b48c
chocolate d2691e
firebrick b22222
brown a52a2a
dark salmon e9967a
darksalmon e9967a
salmon fa8072
light salmon ffa07a
lightsalmon ffa07a
orange ffa500
dark orange ff8c00
darkorange ff8c00
coral ff7f50
light coral f08080
lightcoral f08080
tomato ff6347
orange red ff4500
orangered ff4500
red ff0000
hot pink ff69b4
hotpink ff69b4
deep pink ff1493
deeppink ff1493
pink ffc0cb
light pink ffb6c1
lightpink ffb6c1
pale violet db7093
palevioletred db7093
maroon b03060
medium violet c71585
mediumvioletred c71585
violet red d02090
violetred d02090
magenta ff00ff
violet ee82ee
plum dda0dd
orchid da70d6
medium orchid ba55d3
mediumorchid ba55d3
dark orchid 9932cc
darkorchid 9932cc
dark violet 9400d3
darkviolet 9400d3
blue violet 8a2be2
blueviolet 8a2be2
purple a020f0
medium purple 9370db
mediumpurple 9370db
thistle d8bfd8
"""

# Each line: base name followed by the values of variants 1 to 4.
_NUMBERED = """\
snow fffafa eee9e9 cdc9c9 8b8989
seashell fff5ee eee5de cdc5bf 8b8682
antiquewhite ffefdb eedfcc cdc0b0 8b8378
bisque ffe4c4 eed5b7 cdb79e 8b7d6b
peachpuff ffdab9 eecbad cdaf95 8b7765
navajowhite ffdead eecfa1 cdb38b 8b795e
lemonchiffon fffacd eee9bf cdc9a5 8b8970
cornsilk fff8dc eee8cd cdc8b1 8b8878
ivory fffff0 eeeee0 cdcdc1 8b8b83
honeydew f0fff0 e0eee0 c1cdc1 838b83
lavenderblush fff0f5 eee0e5 cdc1c5 8b8386
mistyrose ffe4e1 eed5d2 cdb7b5 8b7d7b
azure f0ffff e0eeee c1cdcd 838b8b
slateblue 836fff 7a67ee 6959cd 473c8b
royalblue 4876ff 436eee 3a5fcd 27408b
blue 0000ff 0000ee 0000cd 00008b
dodgerblue 1e90ff 1c86ee 1874cd 104e8b
steelblue 63b8ff 5cacee 4f94cd 36648b
deepskyblue 00bfff 00b2ee 009acd 00688b
skyblue 87ceff 7ec0ee 6ca6cd 4a708b
lightskyblue b0e2ff a4d3ee 8db6cd 607b8b
slategray c6e2ff b9d3ee 9fb6cd 6c7b8b
lightsteelblue cae1ff bcd2ee a2b5cd 6e7b8b
lightblue bfefff b2dfee 9ac0cd 68838b
lightcyan e0ffff d1eeee b4cdcd 7a8b8b
paleturquoise bbffff aeeeee 96cdcd 668b8b
cadetblue 98f5ff 8ee5ee 7ac5cd 53868b
turquoise 00f5ff 00e5ee 00c5cd 00868b
cyan 00ffff 00eeee 00cdcd 008b8b
darkslategray 97ffff 8deeee 79cdcd 528b8b
aquamarine 7fffd4 76eec6 66cdaa 458b74
darkseagreen c1ffc1 b4eeb4 9bcd9b 698b69
seagreen 54ff9f 4eee94 43cd80 2e8b57
palegreen 9aff9a 90ee90 7ccd7c 548b54
springgreen 00ff7f 00ee76 00cd66 008b45
green 00ff00 00ee00 00cd00 008b00
chartreuse 7fff00 76ee00 66cd00 458b00
olivedrab c0ff3e b3ee3a 9acd32 698b22
darkolivegreen caff70 bcee68 a2cd5a 6e8b3d
khaki fff68f eee685 cdc673 8b864e
lightgoldenrod ffec8b eedc82 cdbe70 8b814c
lightyellow ffffe0 eeeed1 cdcdb4 8b8b7a
yellow ffff00 eeee00 cdcd00 8b8b00
gold ffd700 eec900 cdad00 8b7500
goldenrod ffc125 eeb422 cd9b1d 8b6914
darkgoldenrod ffb90f eead0e cd950c 8b6508
rosybrown ffc1c1 eeb4b4 cd9b9b 8b6969
indianred ff6a6a ee6363 cd5555 8b3a3a
sienna ff8247 ee7942 cd6839 8b4726
burlywood ffd39b eec591 cdaa7d 8b7355
wheat ffe7ba eed8ae cdba96 8b7e66
tan ffa54f ee9a49 cd853f 8b5a2b
chocolate ff7f24 ee7621 cd661d 8b4513
firebrick ff3030 ee2c2c cd2626 8b1a1a
brown ff4040 ee3b3b cd3333 8b2323
salmon ff8c69 ee8262 cd7054 8b4c39
lightsalmon ffa07a ee9572 cd8162 8b5742
orange ffa500 ee9a00 cd8500 8b5a00
darkorange ff7f00 ee7600 cd6600 8b4500
coral ff7256 ee6a50 cd5b45 8b3e2f
tomato ff6347 ee5c42 cd4f39 8b3626
orangered ff4500 ee4000 cd3700 8b2500
red ff0000 ee0000 cd0000 8b0000
deeppink ff1493 ee1289 cd1076 8b0a50
hotpink ff6eb4 ee6aa7 cd6090 8b3a62
pink ffb5c5 eea9b8 cd919e 8b636c
lightpink ffaeb9 eea2ad cd8c95 8b5f65
palevioletred ff82ab ee799f cd6889 8b475d
maroon ff34b3 ee30a7 cd2990 8b1c62
violetred ff3e96 ee3a8c cd3278 8b2252
magenta ff00ff ee00ee cd00cd 8b008b
orchid ff83fa ee7ae9 cd69c9 8b4789
plum ffbbff eeaeee cd96cd 8b668b
mediumorchid e066ff d15fee b452cd 7a378b
darkorchid bf3eff b23aee 9a32cd 68228b
purple 9b30ff 912cee 7d26cd 551a8b
mediumpurple ab82ff 9f79ee 8968cd 5d478b
thistle ffe1ff eed2ee cdb5cd 8b7b8b
"""

# Grey levels 0 to 100, one byte per level.
_GRAY_LEVELS = (
    "00 03 05 08 0a 0d 0f 12 14 17 1a 1c 1f 21 24 26 29 2b 2e 30 "
    "33 36 38 3b 3d 40 42 45 47 4a 4d 4f 52 54 57 59 5c 5e 61 63 "
    "66 69 6b 6e 70 73 75 78 7a 7d 7f 82 85 87 8a 8c 8f 91 94 96 "
    "99 9c 9e a1 a3 a6 a8 ab ad b0 b3 b5 b8 ba bd bf c2 c4 c7 c9 "
    "cc cf d1 d4 d6 d9 db de e0 e3 e5 e8 eb ed f0 f2 f5 f7 fa fc ff"
)

_TAIL = """\
dark grey a9a9a9
darkgrey a9a9a9
dark gray a9a9a9
darkgray a9a9a9
dark blue 00008b
darkblue 00008b
dark cyan 008b8b
darkcyan 008b8b
dark magenta 8b008b
darkmagenta 8b008b
dark red 8b0000
darkred 8b0000
light green 90ee90
lightgreen 90ee90
"""


def _named_entries(block):
    for line in block.splitlines():
        name, value = line.rsplit(" ", 1)
        yield name, int(value, 16)


def _numbered_entries(block):
    for line in block.splitlines():
        name, *values = line.split()
        for index, value in enumerate(values, start=1):
            yield f"{name}{index}", int(value, 16)


def _gray_entries(levels):
    for index, level in enumerate(levels.split()):
        value = int(level * 3, 16)
        yield f"gray{index}", value
        yield f"grey{index}", value


def _build_table():
    table = {}
    entries = (
        *_named_entries(_BASE),
        *_numbered_entries(_NUMBERED),
        *_gray_entries(_GRAY_LEVELS),
        *_named_entries(_TAIL),
        ("none", NONE_COLOR),
    )
    for name, value in entries:
        table.setdefault(name, value)
    return table


_COLORS = _build_table()


def lookup_color(name):
    """Return the 0xRRGGBB value of a colour name (any case), -1 for ``none``, or None."""
    return _COLORS.get(name.lower())


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _parse_hex(text):
    match = _HEX_NUMBER.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    if sign == "-":
        value = -min(value, _LONG_MAX + 1)
    else:
        value = min(value, _LONG_MAX)
    return _to_int32(value)


def color_from_spec(name, suffix=None):
    """Resolve an XPM colour: ``#rrggbb``, or a name optionally followed by a second word.

    Unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color