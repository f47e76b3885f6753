"""
Engineering constants for steel beam design.
"""

# Section families offered for each section standard.
# Keyed by SectionStandard member name.
SECTION_FAMILY_MAP = {
    "AISC": ["W-Shapes", "HSS-Rectangular", "C-Shapes", "MC-Shapes"],
    "EN": ["IPE", "HEA", "HEB", "HEM", "UPE"],
    "BS": ["UB (Universal Beams)", "UC (Universal Columns)", "PFC (Parallel Flange Channels)"],
    "CSA": ["W-Shapes (CISI)", "HSS (CISI Class H)"],
}

# Families the strength checks apply to. F2, F3 and G2.1 are written for
# doubly symmetric I-shapes; channels and HSS need F4-F7 and G4/G5, so
# their section tables are refused at load time.
I_SHAPE_FAMILIES = {
    "AISC": {"W-Shapes"},
    "EN": {"IPE", "HEA", "HEB", "HEM"},
    "BS": {"UB (Universal Beams)", "UC (Universal Columns)"},
    "CSA": {"W-Shapes (CISI)"},
}
