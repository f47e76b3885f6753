# Data models for AISC 360-16 steel beam design
from .inputs import (
    DesignInputs, DesignParameters, Loads, MaterialProperties,
    BeamType, SectionStandard, MemberUsage
)
from .outputs import (
    AnalysisReport, DesignCheck, ServiceabilityCheck, CamberingInfo,
    LoadCombination, GoverningCombination, NotionalLoad, InternalForces,
    SelectedSection, SectionProperties, DesignSummary, CalculationStep,
    DesignStatus
)
