"""Box, border, centre, max, fixed-grid, form and grid layouts, and a spacer."""