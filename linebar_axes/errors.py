from __future__ import annotations


class ChartDataError(ValueError):
    pass


class EmptyDataSetError(ChartDataError):
    pass


class InvalidLabelCountError(ChartDataError):
    pass


class LabelFormatError(ChartDataError):
    pass
