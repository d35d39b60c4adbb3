from sine_spectrum.config import PlotConfig
from sine_spectrum.exceptions import AnalysisError, ConfigError, RenderError, SineSpectrumError
from sine_spectrum.pipeline import PipelineResult, run

__version__ = "1.0.0"
