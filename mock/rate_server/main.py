from fastapi import FastAPI, HTTPException
from datetime import date
import os

app = FastAPI(title="Mock Reference Rate Server", version="1.0.0")
# Rate and failure mode are controlled from the environment
MOCK_RATE = os.environ.get("MOCK_REFERENCE_RATE", "14.90")
MOCK_FAIL = os.environ.get("MOCK_REFERENCE_RATE_FAIL", "") == "1"

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/dados/serie/bcdata.sgs.4389/dados/ultimos/1")
def latest_rate(formato: str = "json"):
    if MOCK_FAIL:
        raise HTTPException(status_code=503, detail="series unavailable")
    return [{"data": date.today().strftime("%d/%m/%Y"), "valor": MOCK_RATE}]
