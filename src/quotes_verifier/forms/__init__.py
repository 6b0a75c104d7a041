"""Filter form and multi-widget form interaction."""

from .filters import select_filters
from .widgets import FormFiller, FormValues

__all__ = ["FormFiller", "FormValues", "select_filters"]
