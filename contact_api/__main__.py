import uvicorn

from contact_api.settings import HOST, PORT


def main():
    uvicorn.run("contact_api.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
