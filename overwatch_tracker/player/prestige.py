import re
from types import MappingProxyType
from typing import Mapping, Optional

from overwatch_tracker.player.errors import PrestigeLookupError

# background-image:url(https://.../playerlevelrewards/0x0250000000000918_Border.png)
BORDER_IMAGE_ID_RE = re.compile(r"([0-9A-Za-z]+)(?=_Border)")

# Player level border image id -> levels granted by the prestige it represents.
# Each prestige (100 levels) has ten borders, bronze 0-5, silver 6-11, gold 12-17.
PRESTIGE_DEFINITIONS: Mapping[str, int] = MappingProxyType({
    "0x0250000000000918": 0,
    "0x0250000000000919": 0,
    "0x025000000000091A": 0,
    "0x025000000000091B": 0,
    "0x025000000000091C": 0,
    "0x025000000000091D": 0,
    "0x025000000000091E": 0,
    "0x025000000000091F": 0,
    "0x0250000000000920": 0,
    "0x0250000000000921": 0,
    "0x0250000000000922": 100,
    "0x0250000000000923": 100,
    "0x0250000000000924": 100,
    "0x0250000000000925": 100,
    "0x0250000000000926": 100,
    "0x0250000000000927": 100,
    "0x0250000000000928": 100,
    "0x0250000000000929": 100,
    "0x025000000000092A": 100,
    "0x025000000000092B": 100,
    "0x025000000000092C": 200,
    "0x025000000000092D": 200,
    "0x025000000000092E": 200,
    "0x025000000000092F": 200,
    "0x0250000000000930": 200,
    "0x0250000000000931": 200,
    "0x0250000000000932": 200,
    "0x0250000000000933": 200,
    "0x0250000000000934": 200,
    "0x0250000000000935": 200,
    "0x0250000000000936": 300,
    "0x0250000000000937": 300,
    "0x0250000000000938": 300,
    "0x0250000000000939": 300,
    "0x025000000000093A": 300,
    "0x025000000000093B": 300,
    "0x025000000000093C": 300,
    "0x025000000000093D": 300,
    "0x025000000000093E": 300,
    "0x025000000000093F": 300,
    "0x0250000000000940": 400,
    "0x0250000000000941": 400,
    "0x0250000000000942": 400,
    "0x0250000000000943": 400,
    "0x0250000000000944": 400,
    "0x0250000000000945": 400,
    "0x0250000000000946": 400,
    "0x0250000000000947": 400,
    "0x0250000000000948": 400,
    "0x0250000000000949": 400,
    "0x025000000000094A": 500,
    "0x025000000000094B": 500,
    "0x025000000000094C": 500,
    "0x025000000000094D": 500,
    "0x025000000000094E": 500,
    "0x025000000000094F": 500,
    "0x0250000000000950": 500,
    "0x0250000000000951": 500,
    "0x0250000000000952": 500,
    "0x0250000000000953": 500,
    "0x0250000000000954": 600,
    "0x0250000000000955": 600,
    "0x0250000000000956": 600,
    "0x0250000000000957": 600,
    "0x0250000000000958": 600,
    "0x0250000000000959": 600,
    "0x025000000000095A": 600,
    "0x025000000000095B": 600,
    "0x025000000000095C": 600,
    "0x025000000000095D": 600,
    "0x025000000000095E": 700,
    "0x025000000000095F": 700,
    "0x0250000000000960": 700,
    "0x0250000000000961": 700,
    "0x0250000000000962": 700,
    "0x0250000000000963": 700,
    "0x0250000000000964": 700,
    "0x0250000000000965": 700,
    "0x0250000000000966": 700,
    "0x0250000000000967": 700,
    "0x0250000000000968": 800,
    "0x0250000000000969": 800,
    "0x025000000000096A": 800,
    "0x025000000000096B": 800,
    "0x025000000000096C": 800,
    "0x025000000000096D": 800,
    "0x025000000000096E": 800,
    "0x025000000000096F": 800,
    "0x0250000000000970": 800,
    "0x0250000000000971": 800,
    "0x0250000000000972": 900,
    "0x0250000000000973": 900,
    "0x0250000000000974": 900,
    "0x0250000000000975": 900,
    "0x0250000000000976": 900,
    "0x0250000000000977": 900,
    "0x0250000000000978": 900,
    "0x0250000000000979": 900,
    "0x025000000000097A": 900,
    "0x025000000000097B": 900,
    "0x025000000000097C": 1000,
    "0x025000000000097D": 1000,
    "0x025000000000097E": 1000,
    "0x025000000000097F": 1000,
    "0x0250000000000980": 1000,
    "0x0250000000000981": 1000,
    "0x0250000000000982": 1000,
    "0x0250000000000983": 1000,
    "0x0250000000000984": 1000,
    "0x0250000000000985": 1000,
    "0x0250000000000986": 1100,
    "0x0250000000000987": 1100,
    "0x0250000000000988": 1100,
    "0x0250000000000989": 1100,
    "0x025000000000098A": 1100,
    "0x025000000000098B": 1100,
    "0x025000000000098C": 1100,
    "0x025000000000098D": 1100,
    "0x025000000000098E": 1100,
    "0x025000000000098F": 1100,
    "0x0250000000000990": 1200,
    "0x0250000000000991": 1200,
    "0x0250000000000992": 1200,
    "0x0250000000000993": 1200,
    "0x0250000000000994": 1200,
    "0x0250000000000995": 1200,
    "0x0250000000000996": 1200,
    "0x0250000000000997": 1200,
    "0x0250000000000998": 1200,
    "0x0250000000000999": 1200,
    "0x025000000000099A": 1300,
    "0x025000000000099B": 1300,
    "0x025000000000099C": 1300,
    "0x025000000000099D": 1300,
    "0x025000000000099E": 1300,
    "0x025000000000099F": 1300,
    "0x02500000000009A0": 1300,
    "0x02500000000009A1": 1300,
    "0x02500000000009A2": 1300,
    "0x02500000000009A3": 1300,
    "0x02500000000009A4": 1400,
    "0x02500000000009A5": 1400,
    "0x02500000000009A6": 1400,
    "0x02500000000009A7": 1400,
    "0x02500000000009A8": 1400,
    "0x02500000000009A9": 1400,
    "0x02500000000009AA": 1400,
    "0x02500000000009AB": 1400,
    "0x02500000000009AC": 1400,
    "0x02500000000009AD": 1400,
    "0x02500000000009AE": 1500,
    "0x02500000000009AF": 1500,
    "0x02500000000009B0": 1500,
    "0x02500000000009B1": 1500,
    "0x02500000000009B2": 1500,
    "0x02500000000009B3": 1500,
    "0x02500000000009B4": 1500,
    "0x02500000000009B5": 1500,
    "0x02500000000009B6": 1500,
    "0x02500000000009B7": 1500,
    "0x02500000000009B8": 1600,
    "0x02500000000009B9": 1600,
    "0x02500000000009BA": 1600,
    "0x02500000000009BB": 1600,
    "0x02500000000009BC": 1600,
    "0x02500000000009BD": 1600,
    "0x02500000000009BE": 1600,
    "0x02500000000009BF": 1600,
    "0x02500000000009C0": 1600,
    "0x02500000000009C1": 1600,
    "0x02500000000009C2": 1700,
    "0x02500000000009C3": 1700,
    "0x02500000000009C4": 1700,
    "0x02500000000009C5": 1700,
    "0x02500000000009C6": 1700,
    "0x02500000000009C7": 1700,
    "0x02500000000009C8": 1700,
    "0x02500000000009C9": 1700,
    "0x02500000000009CA": 1700,
    "0x02500000000009CB": 1700,
})


def border_image_id(style: Optional[str]) -> Optional[str]:
    """Pull the border image id out of the level widget's inline style."""
    if not style:
        return None
    match = BORDER_IMAGE_ID_RE.search(style)
    return match.group(1) if match else None


def prestige_offset(style: Optional[str], table: Mapping[str, int] = PRESTIGE_DEFINITIONS) -> int:
    identifier = border_image_id(style)
    try:
        return table[identifier]
    except KeyError:
        raise PrestigeLookupError(identifier) from None
