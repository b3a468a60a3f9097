import logging
from functools import partial

import gradio as gr

from dto_schema.catalog import get_available_formats, get_field_types
from dto_schema.config import get_settings
from dto_schema.handlers import (
    export_records_handler,
    load_example_handler,
    load_input_file_handler,
    parse_schema_handler,
)

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

format_choices = [(entry["label"], entry["format"]) for entry in get_available_formats()]

# --- UI Definition ---
with gr.Blocks(title="DTO Schema Exporter") as demo:
    gr.Markdown("# DTO Schema Inference and Export")
    gr.Markdown("Paste example JSON or a TypeScript interface to infer a field schema, then export records in the format you need.")

    with gr.Tab("Infer Schema"):
        with gr.Row():
            # Left Panel: Input
            with gr.Column(scale=1):
                gr.Markdown("### 1. Paste Your DTO or Example Data")
                input_mode = gr.Radio(
                    choices=[("Auto-detect", "auto"), ("JSON", "json"), ("TypeScript", "typescript")],
                    value=settings.default_mode,
                    label="Input Type",
                )
                with gr.Row():
                    json_example_btn = gr.Button("Load JSON example", size="sm")
                    ts_example_btn = gr.Button("Load TypeScript example", size="sm")
                input_text = gr.Code(label="Input", language="json", lines=14)
                input_file = gr.File(label="...or upload a file", file_types=[".json", ".ts", ".txt"])
                parse_btn = gr.Button("Parse", variant="primary")
                parse_status = gr.Textbox(label="Status", interactive=False)

            # Right Panel: Schema
            with gr.Column(scale=1):
                gr.Markdown("### 2. Inferred Schema")
                outline_table = gr.Dataframe(
                    headers=["Path", "Type", "Required", "Nullable"],
                    datatype=["str", "str", "bool", "bool"],
                    col_count=(4, "fixed"),
                    interactive=False,
                    label="Fields",
                )
                schema_json = gr.JSON(label="Schema")

        json_example_btn.click(fn=partial(load_example_handler, "json"), outputs=[input_text, input_mode])
        ts_example_btn.click(fn=partial(load_example_handler, "typescript"), outputs=[input_text, input_mode])

        input_file.upload(
            fn=load_input_file_handler,
            inputs=[input_file],
            outputs=[input_text, parse_status],
        )

        parse_btn.click(
            fn=parse_schema_handler,
            inputs=[input_text, input_mode],
            outputs=[schema_json, parse_status, outline_table],
        )

    with gr.Tab("Export Records"):
        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### 1. Records")
                records_text = gr.Code(label="Records (JSON array of objects)", language="json", lines=14)
                records_file = gr.File(label="...or upload a JSON file", file_types=[".json"])

            with gr.Column(scale=1):
                gr.Markdown("### 2. Output")
                output_format = gr.Radio(choices=format_choices, value="json", label="Output Format")
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=settings.output_name)
                preview_only = gr.Checkbox(label=f"Preview only (first {settings.preview_limit} records)", value=False)
                export_btn = gr.Button("Export Data", variant="primary")
                export_status = gr.Textbox(label="Status", interactive=False)
                download_output = gr.File(label="Download Result")
                output_preview = gr.Textbox(label="Output", lines=14, interactive=False)

        export_btn.click(
            fn=export_records_handler,
            inputs=[records_text, records_file, output_format, output_filename, preview_only],
            outputs=[download_output, export_status, output_preview],
        )

    with gr.Accordion("Field types", open=False):
        gr.Dataframe(
            value=[[t["type"], t["label"], t["description"]] for t in get_field_types()],
            headers=["Type", "Label", "Description"],
            interactive=False,
        )

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
