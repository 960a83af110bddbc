"""
Core module with lazy loading to prevent circular imports.
This module provides access to the packing and outfit engines without
causing circular dependency issues.
"""

import logging

# Module-level variables for lazy loading
_packing_list_generator = None
_outfit_planner = None
_travel_pipeline_orchestrator = None

def get_generate_packing_list():
    """Get generate_packing_list function with lazy loading."""
    global _packing_list_generator
    if _packing_list_generator is None:
        try:
            from .packing_list_generator import generate_packing_list
            _packing_list_generator = generate_packing_list
        except ImportError as e:
            logging.error(f"Failed to import packing_list_generator: {e}")
            _packing_list_generator = None
    return _packing_list_generator

def get_plan_daily_outfits():
    """Get plan_daily_outfits function with lazy loading."""
    global _outfit_planner
    if _outfit_planner is None:
        try:
            from .outfit_planner_agent import plan_daily_outfits
            _outfit_planner = plan_daily_outfits
        except ImportError as e:
            logging.error(f"Failed to import outfit planner: {e}")
            _outfit_planner = None
    return _outfit_planner

def get_travel_pipeline_orchestrator_class():
    """Get the trip planning orchestrator class with lazy loading."""
    global _travel_pipeline_orchestrator
    if _travel_pipeline_orchestrator is None:
        try:
            from .travel_pipeline_orchestrator import TravelPipelineOrchestrator
            _travel_pipeline_orchestrator = TravelPipelineOrchestrator
        except ImportError as e:
            logging.error(f"Failed to import travel pipeline orchestrator: {e}")
            _travel_pipeline_orchestrator = None
    return _travel_pipeline_orchestrator

# Export the getter functions
__all__ = [
    'get_generate_packing_list',
    'get_plan_daily_outfits',
    'get_travel_pipeline_orchestrator_class'
]
