from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "development"
    log_level: str = "INFO"

    # Load model
    max_weekly_hours: int = 30
    weeks_per_period: int = 18
    large_load_threshold: int = 200  # internship / capstone scale

    # Curriculum shape
    total_periods: int = 10
    required_elective_hours: int = 432
    max_complementary_hours: int = 54

    simulation_max_rounds: int = 30

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
