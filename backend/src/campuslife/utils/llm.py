# backend/src/campuslife/utils/llm.py
import json
import logging

import requests

logger = logging.getLogger(__name__)


class LLMUnavailableError(RuntimeError):
    """No usable answer from the language model (network, status or format)."""


def _strip_fences(s: str) -> str:
    s = s.strip()
    if s.startswith("```"):
        s = s.strip("` \n")
        if s.lower().startswith("json"):
            s = s[4:].lstrip()
    return s


def ollama_chat(system_prompt: str, user_prompt: str, model: str, endpoint: str,
                timeout: int = 100, as_json: bool = False) -> str:
    """
    Ruft Ollama /api/chat auf und gibt den Text der Antwort zurueck.
    Netzwerk- und HTTP-Fehler werden als LLMUnavailableError gemeldet.
    """
    url = endpoint.rstrip("/") + "/api/chat"
    payload = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ],
        "stream": False
    }
    if as_json:
        payload["format"] = "json"
        payload["options"] = {"temperature": 0.3}
    try:
        r = requests.post(url, json=payload, timeout=timeout)
        r.raise_for_status()
        body = r.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("[LLM] Ollama request to %s failed: %s", url, exc)
        raise LLMUnavailableError(str(exc)) from exc
    message = body.get("message") if isinstance(body, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise LLMUnavailableError("Unexpected response shape from LLM")
    if not content.strip():
        raise LLMUnavailableError("Empty response from LLM")
    return content


def llm_generate_json(system_prompt: str, user_prompt: str, model: str, endpoint: str,
                      json_root: str, timeout: int = 100):
    """
    Erwartet reines JSON vom LLM.
    Entfernt Code-Fences, prueft Struktur und gibt data[json_root] zurueck.
    """
    content = ollama_chat(system_prompt, user_prompt, model, endpoint, timeout=timeout, as_json=True)
    try:
        data = json.loads(_strip_fences(content))
    except json.JSONDecodeError as exc:
        raise LLMUnavailableError(f"LLM returned invalid JSON: {content[:200]}") from exc
    if isinstance(data, dict) and json_root in data:
        return data[json_root]
    if isinstance(data, list):
        return data
    raise LLMUnavailableError("Unexpected JSON shape from LLM")
