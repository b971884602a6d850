# -*- coding: utf-8 -*-
"""Water intake domain."""
