from .lagna import (
    LagnaRequest,
    LagnaResponse,
    ReadingResponse,
    AnglesOut,
    PlanetOut,
    HouseOut,
    MetaOut,
)
