from enum import Enum


class TeamAbbreviation(str, Enum):
    """Canonical ESPN abbreviations for the 32 NFL teams."""

    # NFC North
    CHI = "CHI"
    GB = "GB"
    DET = "DET"
    MIN = "MIN"
    # NFC East
    DAL = "DAL"
    NYG = "NYG"
    PHI = "PHI"
    WAS = "WAS"
    # NFC South
    TB = "TB"
    NO = "NO"
    ATL = "ATL"
    CAR = "CAR"
    # NFC West
    SF = "SF"
    SEA = "SEA"
    LAR = "LAR"
    ARI = "ARI"
    # AFC North
    BAL = "BAL"
    CIN = "CIN"
    CLE = "CLE"
    PIT = "PIT"
    # AFC East
    BUF = "BUF"
    MIA = "MIA"
    NE = "NE"
    NYJ = "NYJ"
    # AFC South
    IND = "IND"
    JAX = "JAX"
    TEN = "TEN"
    HOU = "HOU"
    # AFC West
    KC = "KC"
    LV = "LV"
    LAC = "LAC"
    DEN = "DEN"
