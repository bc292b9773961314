# -*- coding: utf-8 -*-
"""
utils

Utility helpers for the free-input package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
