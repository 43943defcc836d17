"""
Launch the game locally: python -m numguess
Then open http://127.0.0.1:8000/ in a browser.
"""

import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("numguess.main:app", host="127.0.0.1", port=port)
