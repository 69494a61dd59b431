PROJECT_NAME = "PGAdapter Sample"
API_V1_STR = "/api/v1"
