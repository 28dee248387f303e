import uvicorn

from bakery_data.config import API_HOST, API_PORT

def main():
    uvicorn.run("bakery_api.main:app", host=API_HOST, port=API_PORT, reload=True)

if __name__ == "__main__":
    main()
