import re
from types import MappingProxyType
from typing import Mapping, Optional

from loguru import logger

from trmnl_nfl.models.enums import TeamAbbreviation as T


class TeamNotResolvedError(Exception):
    """Raised when a team name cannot be mapped to an NFL abbreviation."""

    def __init__(self, raw_name: Optional[str]):
        self.raw_name = raw_name
        super().__init__(
            f"Could not resolve team '{raw_name}'. Try a nickname (e.g., 'Bears') "
            "or a standard abbreviation (e.g., 'CHI')."
        )


# Key: lowercased free-form name, Value: canonical ESPN abbreviation.
# Full names and bare city names may deliberately map to the same team.
TEAM_ALIASES: Mapping[str, T] = MappingProxyType(
    {
        # NFC North
        "bears": T.CHI, "chicago bears": T.CHI, "chicago": T.CHI, "chi": T.CHI,
        "packers": T.GB, "green bay packers": T.GB, "green bay": T.GB, "gb": T.GB,
        "lions": T.DET, "detroit lions": T.DET, "detroit": T.DET, "det": T.DET,
        "vikings": T.MIN, "minnesota vikings": T.MIN, "minnesota": T.MIN, "min": T.MIN,
        # NFC East
        "cowboys": T.DAL, "dallas cowboys": T.DAL, "dallas": T.DAL, "dal": T.DAL,
        "giants": T.NYG, "new york giants": T.NYG, "nyg": T.NYG,
        "eagles": T.PHI, "philadelphia eagles": T.PHI, "philadelphia": T.PHI, "phi": T.PHI,
        "commanders": T.WAS, "washington commanders": T.WAS, "washington": T.WAS,
        "was": T.WAS, "wsh": T.WAS,
        # NFC South
        "buccaneers": T.TB, "bucs": T.TB, "tampa bay buccaneers": T.TB,
        "tampa bay": T.TB, "tb": T.TB,
        "saints": T.NO, "new orleans saints": T.NO, "new orleans": T.NO,
        "no": T.NO, "nor": T.NO,
        "falcons": T.ATL, "atlanta falcons": T.ATL, "atlanta": T.ATL, "atl": T.ATL,
        "panthers": T.CAR, "carolina panthers": T.CAR, "carolina": T.CAR, "car": T.CAR,
        # NFC West
        "49ers": T.SF, "niners": T.SF, "san francisco 49ers": T.SF,
        "san francisco": T.SF, "sf": T.SF, "sfo": T.SF,
        "seahawks": T.SEA, "seattle seahawks": T.SEA, "seattle": T.SEA, "sea": T.SEA,
        "rams": T.LAR, "los angeles rams": T.LAR, "la rams": T.LAR, "lar": T.LAR,
        "cardinals": T.ARI, "arizona cardinals": T.ARI, "arizona": T.ARI, "ari": T.ARI,
        # AFC North
        "ravens": T.BAL, "baltimore ravens": T.BAL, "baltimore": T.BAL, "bal": T.BAL,
        "bengals": T.CIN, "cincinnati bengals": T.CIN, "cincinnati": T.CIN, "cin": T.CIN,
        "browns": T.CLE, "cleveland browns": T.CLE, "cleveland": T.CLE, "cle": T.CLE,
        "steelers": T.PIT, "pittsburgh steelers": T.PIT, "pittsburgh": T.PIT, "pit": T.PIT,
        # AFC East
        "bills": T.BUF, "buffalo bills": T.BUF, "buffalo": T.BUF, "buf": T.BUF,
        "dolphins": T.MIA, "miami dolphins": T.MIA, "miami": T.MIA, "mia": T.MIA,
        "patriots": T.NE, "new england patriots": T.NE, "new england": T.NE,
        "ne": T.NE, "nwe": T.NE,
        "jets": T.NYJ, "new york jets": T.NYJ, "nyj": T.NYJ,
        # AFC South
        "colts": T.IND, "indianapolis colts": T.IND, "indianapolis": T.IND, "ind": T.IND,
        "jaguars": T.JAX, "jags": T.JAX, "jacksonville jaguars": T.JAX,
        "jacksonville": T.JAX, "jax": T.JAX,
        "titans": T.TEN, "tennessee titans": T.TEN, "tennessee": T.TEN, "ten": T.TEN,
        "texans": T.HOU, "houston texans": T.HOU, "houston": T.HOU, "hou": T.HOU,
        # AFC West
        "chiefs": T.KC, "kansas city chiefs": T.KC, "kansas city": T.KC,
        "kc": T.KC, "kan": T.KC,
        "raiders": T.LV, "las vegas raiders": T.LV, "vegas raiders": T.LV,
        "las vegas": T.LV, "lv": T.LV, "oakland raiders": T.LV,
        "chargers": T.LAC, "los angeles chargers": T.LAC, "la chargers": T.LAC,
        "lac": T.LAC, "san diego chargers": T.LAC,
        "broncos": T.DEN, "denver broncos": T.DEN, "denver": T.DEN, "den": T.DEN,
    }
)

_LEADING_THE = re.compile(r"^the\s+")


def resolve(raw_name: Optional[str]) -> Optional[T]:
    """Maps a free-form team name, nickname, city or abbreviation to its ESPN abbreviation.

    Lookups ignore case, surrounding whitespace and a single leading "the ".
    Returns None when nothing matches; callers treat that as bad user input.
    """
    if raw_name is None:
        return None

    key = raw_name.strip().lower()
    if not key:
        return None

    abbr = TEAM_ALIASES.get(key)
    if abbr:
        return abbr

    key_without_the = _LEADING_THE.sub("", key, count=1)
    abbr = TEAM_ALIASES.get(key_without_the)
    if abbr:
        return abbr

    # Singular "49er" is common enough to special-case
    if key_without_the == "49er":
        return T.SF

    logger.debug(f"No team alias matches '{key}'")
    return None


def resolve_or_raise(raw_name: Optional[str]) -> T:
    """Like resolve(), but raises TeamNotResolvedError instead of returning None."""
    abbr = resolve(raw_name)
    if abbr is None:
        raise TeamNotResolvedError(raw_name)
    return abbr
