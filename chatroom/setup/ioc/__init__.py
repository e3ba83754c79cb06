from chatroom.setup.ioc.container import (
    AppProvider,
    InMemoryStoreProvider,
    create_container,
    store_provider,
)

__all__ = [
    "AppProvider",
    "InMemoryStoreProvider",
    "create_container",
    "store_provider",
]
