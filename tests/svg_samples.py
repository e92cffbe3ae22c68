"""Small SVG documents shared by the rasterizer, CLI and server tests."""

PLAIN = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">'
    '<rect x="0" y="0" width="20" height="20" fill="#ff0000"/>'
    "</svg>"
)

SMALL = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="8" height="4">'
    '<rect x="0" y="0" width="8" height="4" fill="#0000ff"/>'
    "</svg>"
)

WITH_CONTENT = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">'
    '<rect x="0" y="0" width="20" height="20" fill="#00ff00"/>'
    '<rect id="mapbox-content" x="2" y="5" width="16" height="13" fill="none"/>'
    "</svg>"
)

TRANSFORMED = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">'
    '<g transform="translate(10, 0)">'
    '<rect id="mapbox-content" x="0" y="0" width="5" height="5" fill="none"/>'
    "</g>"
    "</svg>"
)

HIDDEN = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">'
    '<rect id="mapbox-content" x="2" y="2" width="5" height="5" style="display:none"/>'
    "</svg>"
)

STRETCHABLE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20">'
    '<rect x="0" y="0" width="20" height="20" fill="#333333"/>'
    '<rect id="mapbox-stretch" x="4" y="6" width="12" height="8" fill="none"/>'
    "</svg>"
)
