"""Widgets that render themselves into a cell buffer: block, bar chart and canvas."""