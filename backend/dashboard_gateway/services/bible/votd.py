"""Curated verse-of-the-day fallback list (USFM ids, one per day, wrapping)."""

DEFAULT_BIBLE_ID = 111  # NIV 2011
DEFAULT_TRANSLATION = "NIV"

DAILY_VERSES = [
    "JER.29.11", "ISA.41.10", "JOS.1.9", "PHP.4.13", "ISA.40.31", "ROM.8.28",
    "DEU.31.6", "PSA.46.1", "MAT.11.28", "ROM.15.13", "PSA.23.4", "JHN.14.27",
    "PHP.4.6-PHP.4.7", "PSA.34.18", "1PE.5.7", "ISA.26.3", "PSA.147.3", "PSA.55.22",
    "PSA.46.10", "COL.3.15", "2CO.12.9", "PSA.27.1", "ISA.40.29", "PSA.28.7",
    "PSA.18.2", "2TI.1.7", "ISA.12.2", "PSA.118.6", "PSA.73.26", "NAM.1.7",
    "LAM.3.22-LAM.3.23", "2TH.3.3", "PHP.1.6", "NUM.6.24-NUM.6.26", "PSA.37.4", "JER.31.3",
    "PSA.145.18", "PSA.138.7", "HEB.13.5", "ISA.49.15-ISA.49.16", "ROM.8.31", "JHN.16.33",
    "GAL.6.9", "JAS.1.2-JAS.1.3", "JAS.1.12", "2CO.4.16-2CO.4.17", "HEB.10.35-HEB.10.36",
    "ROM.5.3-ROM.5.4", "HEB.12.1", "PSA.31.24", "PRO.3.5-PRO.3.6", "PSA.56.3", "JER.17.7",
    "PSA.62.1-PSA.62.2", "PRO.16.3", "ISA.30.21", "PSA.32.8", "PSA.16.8",
    "PSA.121.1-PSA.121.2", "MIC.7.7", "PSA.91.1-PSA.91.2", "ISA.43.2",
    "PSA.121.7-PSA.121.8", "PSA.91.11", "ISA.54.17", "PSA.34.4", "PRO.18.10", "PSA.94.19",
    "PSA.40.1-PSA.40.2", "DEU.33.27", "PSA.30.5", "ISA.43.18-ISA.43.19", "2CO.5.17",
    "ECC.3.11", "JHN.15.11", "ROM.12.12", "HAB.3.17-HAB.3.18", "ZEP.3.17", "PSA.23.1",
    "JER.29.13", "ROM.8.38-ROM.8.39", "1JN.4.18", "EPH.3.20", "PHP.4.19", "JHN.10.10",
    "PSA.103.2-PSA.103.4", "ISA.40.28", "MAT.11.29-MAT.11.30", "ISA.61.1", "JHN.14.1",
]


def curated_reference(day: int) -> str:
    """Reference for a day of the year. Day 1 is the first entry; any int wraps."""
    return DAILY_VERSES[(day - 1) % len(DAILY_VERSES)]
