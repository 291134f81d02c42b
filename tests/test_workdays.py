#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for business day arithmetic.
"""
#==============================================================================
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

import pandas as pd
import pytest

from flow_cpm import BusinessCalendar


@pytest.fixture
def calendar():
    return BusinessCalendar()


class TestWorkdayWithOffset:
    """Offsets skip weekends and holidays."""

    @pytest.mark.parametrize('start, offset, expected', [
        ('2024-11-20', 1,   '2024-11-21'),
        ('2024-11-22', 1,   '2024-11-25'),
        ('2024-11-27', 1,   '2024-11-29'),
        ('2024-07-03', 1,   '2024-07-05'),
        ('2024-12-24', 1,   '2024-12-26'),
        ('2024-11-20', 1.2, '2024-11-22'),
        ('2024-11-18', 5,   '2024-11-25'),
    ])
    def test_offset(self, calendar, start, offset, expected):
        assert calendar.workday_with_offset(offset, start).normalize() == pd.Timestamp(expected)

    @pytest.mark.parametrize('offset', [0, -3])
    def test_no_offset(self, calendar, offset):
        start = pd.Timestamp('2024-11-23 10:30')
        assert calendar.workday_with_offset(offset, start) == start

    def test_time_of_day_is_kept(self, calendar):
        ecd = calendar.workday_with_offset(1, '2024-11-27 10:30')
        assert ecd == pd.Timestamp('2024-11-29 10:30')

    def test_default_start(self, calendar):
        assert calendar.workday_with_offset(1) > pd.Timestamp.now()


class TestIsWorkday:

    @pytest.mark.parametrize('day, expected', [
        ('2024-11-26', True),
        ('2024-11-23', False),
        ('2024-11-28', False),
        ('2024-12-25', False),
        ('2021-07-05', False),
        ('2024-09-02', False),
        ('2024-05-27', False),
    ])
    def test_is_workday(self, calendar, day, expected):
        assert calendar.is_workday(day) == expected

    def test_weekmask(self):
        calendar = BusinessCalendar(weekmask='Mon Tue Wed Thu Fri Sat')
        assert calendar.is_workday('2024-11-23')
