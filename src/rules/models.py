from pydantic import BaseModel, Field, model_validator

DEFAULT_REGIONS: dict[str, list[str]] = {
    "Southern Region": [
        "Lagos", "Rivers", "Bayelsa", "Delta", "Edo", "Cross River", "Akwa Ibom", "Calabar",
    ],
    "Eastern Region": ["Enugu", "Ebonyi", "Anambra", "Imo", "Abia"],
    "South-Western Region": ["Oyo", "Ogun", "Ondo", "Osun", "Ekiti"],
    "Central Region": ["Kaduna", "Kogi", "Kwara", "Nasarawa", "Niger", "Plateau", "Benue"],
    "Northern Region": ["Kano", "Katsina", "Jigawa", "Kebbi", "Sokoto", "Zamfara"],
    "North-Eastern Region": ["Borno", "Yobe", "Adamawa", "Gombe", "Taraba"],
    "Federal Capital Territory": ["FCT"],
}


class ProjectRules(BaseModel):
    slug: str = "numeric-worksheet"
    rules_version: str = "1"


class CalculatorRules(BaseModel):
    operators: list[str] = Field(default_factory=lambda: ["+", "-", "*", "/", "%"])


class TableRules(BaseModel):
    min_start: int = 1
    max_span: int = 100


class TextRules(BaseModel):
    top_n: int = Field(default=10, ge=1)


class AgeRules(BaseModel):
    min_age: int = 0
    max_age: int = 150


class PayrollRates(BaseModel):
    tax: float = 0.125
    pension: float = 0.075
    health: float = 0.05
    housing: float = 0.05


class PayrollRules(BaseModel):
    current_year: int = 2026
    gross_pay: float = 100000
    retirement_age: int = 65
    min_birth_year: int = 1950
    max_birth_year: int = 2010
    rates: PayrollRates = Field(default_factory=PayrollRates)

    @model_validator(mode="after")
    def check_birth_years(self) -> "PayrollRules":
        if self.min_birth_year > self.max_birth_year:
            raise ValueError("min_birth_year must not exceed max_birth_year")
        return self


class StabilityRules(BaseModel):
    very_stable_below: float = 1.5
    moderately_stable_below: float = 3.0


class RainfallRules(BaseModel):
    flood_threshold: float = 10.0
    top_n: int = Field(default=5, ge=1)
    stability: StabilityRules = Field(default_factory=StabilityRules)
    regions: dict[str, list[str]] = Field(default_factory=lambda: dict(DEFAULT_REGIONS))


class WorksheetRules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    calculator: CalculatorRules = Field(default_factory=CalculatorRules)
    table: TableRules = Field(default_factory=TableRules)
    text: TextRules = Field(default_factory=TextRules)
    ages: AgeRules = Field(default_factory=AgeRules)
    payroll: PayrollRules = Field(default_factory=PayrollRules)
    rainfall: RainfallRules = Field(default_factory=RainfallRules)
