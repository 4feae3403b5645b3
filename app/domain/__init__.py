"""Domain packages: one package per business area (schemas, repository, service, router)"""
