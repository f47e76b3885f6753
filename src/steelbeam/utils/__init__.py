from .tables import load_design_tables
