# Domain package initialization
# Pure catalog entities and the interfaces the service layer depends on
