class GeoDataError(Exception):
    pass


class DuplicateCountryError(GeoDataError):
    pass


class UnknownCountryError(GeoDataError):
    pass


class AdjacencyAsymmetryError(GeoDataError):
    pass
