class SineSpectrumError(Exception):
    """Base error. `stage` names the part of the pipeline that failed."""
    stage = "pipeline"

    def __init__(self, message, stage=None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class ConfigError(SineSpectrumError):
    stage = "config"


class AnalysisError(SineSpectrumError):
    stage = "analysis"


class RenderError(SineSpectrumError):
    stage = "render"
