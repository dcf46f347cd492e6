"""
Single-page front-end
Question ID form that calls /lookup and shows the highlighted solution
"""
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Solution Viewer</title>
  <style>
    body {
      margin: 0;
      min-height: 100vh;
      font-family: system-ui, sans-serif;
      color: #fff;
      background: linear-gradient(135deg, #1e1e2f, #3a2d5c);
      display: flex;
      flex-direction: column;
      align-items: center;
      padding: 40px 16px;
      box-sizing: border-box;
    }
    .panel {
      background: rgba(255, 255, 255, 0.1);
      border: 1px solid rgba(255, 255, 255, 0.2);
      border-radius: 16px;
      padding: 24px;
      width: 100%;
      max-width: 900px;
      box-sizing: border-box;
    }
    .controls { display: flex; gap: 12px; }
    input {
      flex: 1;
      padding: 12px;
      font-size: 1.1rem;
      border-radius: 12px;
      border: 1px solid rgba(255, 255, 255, 0.3);
      background: rgba(0, 0, 0, 0.2);
      color: #fff;
    }
    button {
      padding: 12px 24px;
      font-size: 1.1rem;
      font-weight: 600;
      border-radius: 12px;
      border: 1px solid rgba(255, 255, 255, 0.2);
      background: rgba(255, 255, 255, 0.15);
      color: #fff;
      cursor: pointer;
    }
    button:disabled { color: rgba(255, 255, 255, 0.5); cursor: not-allowed; }
    #error { color: #ff8080; margin-top: 16px; }
    #solution { margin-top: 24px; overflow-x: auto; }
    #solution pre { padding: 16px; border-radius: 12px; }
  </style>
</head>
<body>
  <div class="panel">
    <h1>Solution Viewer</h1>
    <div class="controls">
      <input id="question-id" type="text" placeholder="Enter Question ID" autocomplete="off">
      <button id="fetch-button" type="button">Get Solution</button>
    </div>
    <div id="error" hidden></div>
    <div id="solution"></div>
  </div>
  <script>
    const input = document.getElementById("question-id");
    const button = document.getElementById("fetch-button");
    const errorBox = document.getElementById("error");
    const solutionBox = document.getElementById("solution");

    function showError(message) {
      errorBox.textContent = message;
      errorBox.hidden = false;
    }

    async function fetchSolution() {
      const questionId = input.value.trim();
      if (!questionId) {
        showError("Please enter a Question ID.");
        return;
      }

      button.disabled = true;
      button.textContent = "Loading...";
      errorBox.hidden = true;
      solutionBox.innerHTML = "";

      try {
        const res = await fetch("/lookup?questionId=" + encodeURIComponent(questionId));
        const data = await res.json();
        if (!res.ok || data.error) {
          throw new Error(data.error || "API request failed");
        }
        if (!data.markup) {
          throw new Error("No solution markup was returned.");
        }
        solutionBox.innerHTML = data.markup;
      } catch (err) {
        showError(err instanceof Error ? err.message : "An unknown error occurred.");
      } finally {
        button.disabled = false;
        button.textContent = "Get Solution";
      }
    }

    button.addEventListener("click", fetchSolution);
    input.addEventListener("keydown", (event) => {
      if (event.key === "Enter") fetchSolution();
    });
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
async def index():
    """Serve the solution viewer page"""
    return HTMLResponse(content=PAGE_HTML)
