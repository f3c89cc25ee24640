"""dashboard_charts: render small dashboard chart images with matplotlib.

Provides the color and geometry kernel shared by dashboard charts: gradient
colormaps built from Colorbrewer palettes, polygon bounds / area / centroid,
an oblique pseudo-3D projection, fitting of named regions onto a pixel canvas,
and stepped colorbar / loadbar legends.

Usage:
    python scripts/dashboard_charts --config config/example.yaml
    python scripts/dashboard_charts --preview palettes
    python scripts/dashboard_charts --all
    python scripts/dashboard_charts --list

Requires: pip install numpy matplotlib PyYAML pydantic
"""
