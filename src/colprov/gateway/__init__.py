from colprov.gateway.base import DataStoreGateway
from colprov.gateway.postgrest import PostgrestGateway

__all__ = ["DataStoreGateway", "PostgrestGateway"]
