# -*- coding: utf-8 -*-

"""The PyPlatinumRTD package converts between temperature and resistance for
platinum resistance temperature detectors (PT50, PT100, PT200, PT500 and PT1000)
using the Callendar-Van Dusen equation."""

__author__ = 'CINF <knielsen.fysik.dtu.dk>'
__email__ = 'knielsen@fysik.dtu.dk'
__version__ = '0.1.dev0'
__website__ = 'https://github.com/CINF/PyPlatinumRTD'
__license__ = 'GNU GPL3'
__description__ = 'Temperature and resistance conversions for platinum RTD sensors (PT50 to PT1000) using the Callendar-Van Dusen equation.'
__uri__ = 'https://github.com/CINF/PyPlatinumRTD'
