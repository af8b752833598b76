"""
Application settings and configuration.
"""

import os
from typing import List

class Settings:
    """Application settings"""
    
    # API Configuration
    api_title: str = "Outbreak Simulation API"
    api_description: str = "API for stepping multi-host pathogen evolution under drug pressure"
    api_version: str = "1.0.0"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    
    # Server Configuration
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    reload: bool = os.getenv("RELOAD", "true").lower() == "true"
    
    # CORS Configuration
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ]
    allow_credentials: bool = True
    allowed_methods: List[str] = ["GET", "POST", "DELETE", "OPTIONS"]
    allowed_headers: List[str] = ["*"]
    
    # Simulation limits
    max_host_count: int = int(os.getenv("MAX_HOST_COUNT", "50"))
    max_population_per_host: int = int(os.getenv("MAX_POPULATION_PER_HOST", "10000"))
    max_steps_per_request: int = int(os.getenv("MAX_STEPS_PER_REQUEST", "1000"))
    max_active_simulations: int = int(os.getenv("MAX_ACTIVE_SIMULATIONS", "20"))
    
    # Rendering
    default_host_view_limit: int = 100
    
    # Logging Configuration
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

# Create global settings instance
settings = Settings() 
