"""FAO-56 crop water-demand estimates from reference evapotranspiration."""

__version__ = "0.1.0"
