# -*- coding: utf-8 -*-
"""Meal planning domain."""
