# -*- coding: utf-8 -*-
"""User profile slots (current weight, goal weight, onboarding)."""
