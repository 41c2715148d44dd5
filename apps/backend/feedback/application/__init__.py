"""
===============================================================================
APPLICATION LAYER
===============================================================================

Los casos de uso viven en `usecases/` (reviews, users).
===============================================================================
"""
