import pytest

from sine_spectrum.config import PlotConfig


@pytest.fixture
def small_config(tmp_path):
    # 64 samples, 8 and 27 samples per cycle
    return PlotConfig(width=84, height=100, border=10, period_a=8, period_b=27,
                      output_path=str(tmp_path / "small.png"))
