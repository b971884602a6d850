# -*- coding: utf-8 -*-
"""Planning (per-day preview across water and meals)."""
