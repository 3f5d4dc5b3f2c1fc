#!/usr/bin/env python
# coding:utf-8

from typing import Any
from math import isfinite as mathIsfinite

from .error_handler import ValidationError



#-----------------------------------------------------------------------------------------------
def parse_sample(raw: Any) -> float:
    """
    Turn raw user input into a finite float ready for SlidingWindow.push.
    Blank, non-numeric, boolean, NaN and infinite input raise ValidationError.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"Not a number: {raw!r}")

    if isinstance(raw, str):
        text = raw.strip()
        if text == "":
            raise ValidationError("Empty input")
        try:
            value = float(text)
        except ValueError as e:
            raise ValidationError(f"Not a number: {raw!r}") from e
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Not a number: {raw!r}") from e

    if not mathIsfinite(value):
        raise ValidationError(f"Not a finite number: {raw!r}")
    return value
