#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
    FlowCPM
    Copyright (C) 2025 anonimous

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.

    Please contact with me by E-mail: shkolnick.kun@gmail.com
"""
import math
import pandas as pd
from pandas.tseries.holiday import (AbstractHolidayCalendar, Holiday, USLaborDay,
                                    USMemorialDay, USThanksgivingDay, nearest_workday)
from pandas.tseries.offsets import CustomBusinessDay

#==============================================================================
class CompanyHolidayCalendar(AbstractHolidayCalendar):
    """Holidays observed by default: a subset of US federal holidays."""
    rules = [
        Holiday('New Year', month=1, day=1, observance=nearest_workday),
        USMemorialDay,
        Holiday('Independence Day', month=7, day=4, observance=nearest_workday),
        USLaborDay,
        USThanksgivingDay,
        Holiday('Christmas Day', month=12, day=25, observance=nearest_workday),
    ]

#==============================================================================
class BusinessCalendar:
    """
    Business days calendar used for estimated completion dates.

    Parameters
    ----------
    holidays : pandas.tseries.holiday.AbstractHolidayCalendar, optional
        Holiday calendar, :class:`CompanyHolidayCalendar` by default
    weekmask : str, default='Mon Tue Wed Thu Fri'
        Working days of the week

    Notes
    -----
    The calendar is a plain value, it is created by the caller and
    passed explicitly to the functions that need it.
    """

    def __init__(self, holidays=None, weekmask='Mon Tue Wed Thu Fri'):
        self.holidays = holidays if holidays is not None else CompanyHolidayCalendar()
        self.weekmask = weekmask
        self._offset  = CustomBusinessDay(calendar=self.holidays, weekmask=weekmask)

    def workday_with_offset(self, offset, start=None):
        """
        Get the date that is a number of business days after a start time.

        Parameters
        ----------
        offset : float
            Number of business days, rounded up
        start : datetime-like, optional
            Start time, now if None

        Returns
        -------
        pandas.Timestamp
        """
        start = pd.Timestamp.now() if start is None else pd.Timestamp(start)
        days = int(math.ceil(offset))
        if days <= 0:
            return start
        return start + days * self._offset

    def is_workday(self, day):
        """Check if the date is a business day."""
        return self._offset.is_on_offset(pd.Timestamp(day).normalize())
