"""SVG preview of a parcel scene: labels, view state, and rendering."""
