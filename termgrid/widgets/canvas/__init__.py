"""A canvas widget and the line, points and rectangle shapes drawn on it."""