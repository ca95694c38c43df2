"""
Embedded templates for the generated Terraform repository.

Templates rendered with ``str.format`` double their literal braces. The
``${linux_script}`` and ``${windows_script}`` tokens are left for Terraform's
``templatefile`` to resolve.
"""

from __future__ import annotations

DEFAULT_REPOSITORY_NAME = "my-ssm-doc-repo"
DEFAULT_AWS_PROFILE = "admin-usergroup"
DEFAULT_AWS_REGION = "us-east-1"
DOCUMENT_NAME_SUFFIX = "-sh-PS1-Doc"

ROOT_MAIN_TF = """terraform {{
  required_version = ">= 1.0.0"
  required_providers {{
    aws = {{
      source  = "hashicorp/aws"
      version = ">= 4.0"
    }}
  }}
}}

# The AWS provider will read the profile and region variables from variables.tf
provider "aws" {{
  profile = var.aws_profile
  region  = var.aws_region
}}

module "ssm_document" {{
  source = "./modules/ssm_document"
  document_name = "{document_name}"
}}
"""

ROOT_VARIABLES_TF = """variable "aws_profile" {{
  type        = string
  description = "Which AWS CLI profile to use (Ex: admin-usergroup, prod, dev)."
  default     = "{aws_profile}"
}}

variable "aws_region" {{
  type        = string
  description = "Which AWS region to use (Ex: us-east-1, us-west-2)."
  default     = "{aws_region}"
}}
"""

README_MD = """# {repository_name}

This repository contains Terraform code to create an AWS SSM document with both shell and PowerShell script sections.

## Directory Structure

```
{repository_name}/
├── main.tf
├── variables.tf
├── README.md
├── modules
│   └── ssm_document
│       ├── main.tf
│       ├── variables.tf
│       ├── outputs.tf
│       └── templates
│           └── ssm_document.yaml
└── scripts
    ├── linux_script.sh
    └── windows_script.ps1
```

## Quick Start

1. Install Terraform (v1.0.0 or higher).
2. `cd` into this directory (`cd {repository_name}`).
3. Run:
   ```
   terraform init
   terraform validate
   terraform plan
   terraform apply
   ```

## Switching Accounts and Regions

To deploy to other accounts or regions, use the `-var` flag:

- **Different Profile** (Ex: `prod`):
  ```
  terraform apply -var="aws_profile=prod"
  ```
- **Different Region** (Ex: `us-west-2`):
  ```
  terraform apply -var="aws_region=us-west-2"
  ```
- **Both Profile and Region** (Ex: `us-west-2 & prod`):
  ```
  terraform apply -var="aws_region=us-west-2" -var="aws_profile=prod"
  ```

## Customizing Scripts

Inside `scripts/`, you can add your own commands to:
- **`linux_script.sh`** for Linux.
- **`windows_script.ps1`** for Windows.

These are referenced directly in the SSM document.

## Version Control

After setting up the project, don't forget to initialize a Git repository:

```
git init
git add .
git commit -m "Initial commit for {repository_name}"
```

"""

# Static: written as-is, no first-stage substitution.
MODULE_MAIN_TF = """resource "aws_ssm_document" "shell_and_powershell_doc" {
  name          = var.document_name
  document_type = "Command"

  content = templatefile("${path.module}/templates/ssm_document.yaml", {
    linux_script   = file("${path.module}/../scripts/linux_script.sh")
    windows_script = file("${path.module}/../scripts/windows_script.ps1")
  })
}
"""

MODULE_VARIABLES_TF = """variable "document_name" {
  type        = string
  description = "Name of the SSM document."
}
"""

MODULE_OUTPUTS_TF = """output "ssm_document_name" {
  value       = aws_ssm_document.shell_and_powershell_doc.name
  description = "The name of the created SSM document."
}
"""

SSM_DOCUMENT_TEMPLATE = """{{
  "schemaVersion": "2.2",
  "description": "SSM Document created by {repository_name}, containing both Linux and Windows scripts.",
  "mainSteps": [
    {{
      "action": "aws:runShellScript",
      "name": "{repository_name}_RunLinuxScript",
      "inputs": {{
        "runCommand": [
          "${{linux_script}}"
        ]
      }}
    }},
    {{
      "action": "aws:runPowerShellScript",
      "name": "{repository_name}_RunWindowsScript",
      "inputs": {{
        "runCommand": [
          "${{windows_script}}"
        ]
      }}
    }}
  ]
}}
"""

LINUX_SCRIPT = """#!/usr/bin/env bash
echo "Running Linux script from {repository_name}..."
# Add your Linux commands here
"""

WINDOWS_SCRIPT = """Write-Host "Running Windows script from {repository_name}..."
# Add your Windows commands here
"""
