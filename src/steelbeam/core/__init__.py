# Core calculation engine
from .beam_design import BeamDesignEngine, run_analysis
from .load_combinations import generate_load_combinations, governing_combination
from .internal_forces import solve_internal_forces, support_reaction
from .strength import StrengthChecker
from .serviceability import ServiceabilityChecker, uniform_load_deflection
from .cambering import CamberingAdvisor
from .section_selector import SelectionResult, select_section
from .report import assemble_report
