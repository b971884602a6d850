# -*- coding: utf-8 -*-
"""FastToHabit: local fasting, water, meal plan and weight tracking."""
