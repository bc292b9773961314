# -*- coding: utf-8 -*-
"""
core

Core building blocks: markup tree, CSS units, upload records, settings.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
