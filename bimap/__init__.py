from bimap.bimap import BiMap
from bimap.views import BiMapView, create_map

__all__ = ['BiMap', 'BiMapView', 'create_map']
