"""Land-parcel geometry and KML interchange.

Captures a farmer's land boundary as a polygon ring, computes its area in
hectares and a representative point, classifies it by size, and exchanges
parcels with GIS tooling through KML 2.2 documents.
"""

__version__ = "0.1.0"
