# cancer_api/database/init_db.py
from cancer_api.services.save_service import PredictionStore


def main():
    print("Creating tables...")
    PredictionStore().create_tables()
    print("Done.")


if __name__ == "__main__":
    main()
