"""Browser view: note editor plus the action list.

The page keeps no persistent local state. The action list is re-read from
`/actions` after every mutating call and rendered in the order the server
returns.
"""

DASHBOARD_HTML = """
<html>
  <head>
    <title>ActionScribe</title>
    <style>
      body { font-family: monospace; max-width: 1100px; margin: 40px auto; }
      .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; }
      textarea { width: 100%; min-height: 500px; font-family: monospace; }
      .action { background: #f5f5f5; padding: 10px; border-radius: 6px; margin: 6px 0; }
      .done { text-decoration: line-through; color: #888; }
      .ts { font-size: 11px; color: #777; }
      button { padding: 8px 16px; font-size: 14px; }
    </style>
  </head>
  <body>
    <h1>ActionScribe</h1>
    <p>
      Session token: <input id="token" type="password" size="32">
      <button onclick="refresh()">Connect</button>
    </p>
    <div class="grid">
      <div>
        <button id="save" onclick="saveAndExtract()">Save &amp; Extract</button>
        <textarea id="note" placeholder="Enter your notes here..."></textarea>
      </div>
      <div>
        <h2>Extracted Actions <small id="count"></small></h2>
        <div id="actions"></div>
      </div>
    </div>

    <script>
      let previousContent = "";
      let actions = [];
      let isProcessing = false;

      function headers() {
        return {
          "Content-Type": "application/json",
          "Authorization": "Bearer " + document.getElementById("token").value,
        };
      }

      function extractNewContent(oldContent, newContent) {
        const oldLines = new Set(oldContent.split("\\n"));
        return newContent.split("\\n").filter(l => !oldLines.has(l)).join("\\n");
      }

      function parseActions(raw) {
        if (!raw || raw.trim() === "NO_ACTIONS") return [];
        return raw.split("\\n").map(l => l.trim()).filter(l => l);
      }

      async function refresh() {
        try {
          const res = await fetch("/actions", { headers: headers() });
          if (!res.ok) throw new Error("HTTP " + res.status);
          actions = await res.json();
          render();
        } catch (e) {
          console.error("Error loading actions:", e);
        }
      }

      async function saveAndExtract() {
        if (isProcessing) return;
        const noteContent = document.getElementById("note").value;
        const delta = extractNewContent(previousContent, noteContent);
        if (delta.trim()) {
          isProcessing = true;
          document.getElementById("save").disabled = true;
          try {
            const res = await fetch("/extract-actions", {
              method: "POST", headers: headers(), body: JSON.stringify({ text: delta }),
            });
            if (!res.ok) throw new Error("Failed to extract actions");
            const data = await res.json();
            const candidates = parseActions(data.actions);
            if (candidates.length) {
              // dedup happens server-side against the stored list
              const merged = await fetch("/actions/merge", {
                method: "POST", headers: headers(), body: JSON.stringify({ candidates }),
              });
              if (!merged.ok) throw new Error("Failed to save actions: HTTP " + merged.status);
            }
            await refresh();
          } catch (e) {
            console.error("Error extracting actions:", e);
          } finally {
            isProcessing = false;
            document.getElementById("save").disabled = false;
          }
        }
        previousContent = noteContent;
      }

      async function toggle(id, completed) {
        try {
          const res = await fetch("/actions", {
            method: "PATCH", headers: headers(), body: JSON.stringify({ id, completed }),
          });
          if (!res.ok) throw new Error("HTTP " + res.status);
          await refresh();
        } catch (e) {
          console.error("Error updating action:", e);
        }
      }

      function render() {
        document.getElementById("count").textContent = "(" + actions.length + " items)";
        const box = document.getElementById("actions");
        box.innerHTML = "";
        if (actions.length === 0) {
          box.textContent = 'No actions extracted yet. Write some notes and click "Save & Extract"!';
          return;
        }
        for (const a of actions) {
          const row = document.createElement("div");
          row.className = "action";
          const cb = document.createElement("input");
          cb.type = "checkbox";
          cb.checked = a.completed;
          cb.onchange = () => toggle(a.id, !a.completed);
          const text = document.createElement("span");
          text.textContent = " " + a.text;
          if (a.completed) text.className = "done";
          const ts = document.createElement("div");
          ts.className = "ts";
          ts.textContent = new Date(a.timestamp).toLocaleString();
          row.append(cb, text, ts);
          box.appendChild(row);
        }
      }
    </script>
  </body>
</html>
"""
